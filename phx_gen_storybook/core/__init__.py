"""Host project metadata, logging and errors."""
