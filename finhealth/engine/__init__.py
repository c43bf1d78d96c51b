"""Pure calculations over record collections."""
