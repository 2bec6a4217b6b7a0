"""OS family and Windows shell-environment detection."""
