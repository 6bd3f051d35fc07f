"""Transform families used by the manipulations catalog."""
