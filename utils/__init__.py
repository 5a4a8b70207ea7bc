# utils - logging, environment config and CSV payload helpers
