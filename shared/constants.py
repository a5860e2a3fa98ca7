# Rule names used as keys in violation reports and message tables
RULE_REQUIRED = "required"
RULE_IS_STRING = "is_string"
RULE_IS_BOOLEAN = "is_boolean"
RULE_IS_NUMBER = "is_number"
RULE_MAX_DECIMAL_PLACES = "max_decimal_places"
RULE_IS_UUID = "is_uuid"
RULE_IS_ENUM = "is_enum"
RULE_IS_DATE = "is_date"
RULE_MIN_LENGTH = "min_length"
RULE_MAX_LENGTH = "max_length"
RULE_MIN = "min"

# Default message templates, formatted with the field name and rule params.
# Schemas override them per (field, rule) in their own message tables.
DEFAULT_RULE_MESSAGES = {
    RULE_REQUIRED: "{field} should not be empty",
    RULE_IS_STRING: "{field} must be a string",
    RULE_IS_BOOLEAN: "{field} must be a boolean value",
    RULE_IS_NUMBER: (
        "{field} must be a number conforming to the specified constraints"
    ),
    RULE_MAX_DECIMAL_PLACES: (
        "{field} must have at most {places} decimal places"
    ),
    RULE_IS_UUID: "{field} must be a UUID",
    RULE_IS_ENUM: "{field} must be one of the following values: {members}",
    RULE_IS_DATE: "{field} must be a Date instance",
    RULE_MIN_LENGTH: (
        "{field} must be longer than or equal to {min_length} characters"
    ),
    RULE_MAX_LENGTH: (
        "{field} must be shorter than or equal to {max_length} characters"
    ),
    RULE_MIN: "{field} must not be less than {min_value}",
}

# GraphQL scalars that need no declaration in rendered SDL
BUILTIN_SCALARS = frozenset({"String", "Boolean", "Int", "Float", "ID"})
