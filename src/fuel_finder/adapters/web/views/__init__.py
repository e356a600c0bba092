"""LiveViews served by the web adapter."""
