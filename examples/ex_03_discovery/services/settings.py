TIMEZONE = "UTC"
