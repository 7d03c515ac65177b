"""Terminal and file reporting."""
