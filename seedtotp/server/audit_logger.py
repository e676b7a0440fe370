import logging
import os

LOGGER_NAME = "seedtotp.audit"
LOG_FORMAT = '%(asctime)s - %(message)s'

class AuditLogger:
    def __init__(self, log_file=None):
        self.logger = logging.getLogger(LOGGER_NAME)
        self.logger.setLevel(logging.INFO)
        if log_file:
            path = os.path.abspath(log_file)
            # One handler per file, however many loggers point at it
            if not any(getattr(h, "baseFilename", None) == path for h in self.logger.handlers):
                handler = logging.FileHandler(path)
                handler.setFormatter(logging.Formatter(LOG_FORMAT))
                self.logger.addHandler(handler)

    def log_action(self, user, action):
        self.logger.info(f"User: {user}, Action: {action}")

    def log_failure(self, user, action, error):
        # Error class name only: messages may be caller supplied
        self.logger.warning(f"User: {user}, Action: {action}, Failed: {type(error).__name__}")
