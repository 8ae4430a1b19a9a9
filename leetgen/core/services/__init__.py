"""Services — file writing and library bootstrap."""
