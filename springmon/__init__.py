"""SpringMon — generic status and entity echo service."""
