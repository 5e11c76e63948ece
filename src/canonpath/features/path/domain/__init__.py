"""Path value objects, validation rules and errors."""
