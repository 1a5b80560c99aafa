# --- START OF FILE utils/logging_utils.py ---
import logging
import os
import time

project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
log_file_path = os.path.join(project_root, 'bbcode_mode_debug.txt')


class DuplicateFilter(logging.Filter):
    """Drops a message already emitted less than time_window seconds ago."""
    def __init__(self, time_window=0.5):
        super().__init__()
        self.time_window = time_window
        self.last_seen = {}

    def filter(self, record):
        now = time.monotonic()
        message = record.getMessage()
        # highlighting logs once per block, so repeats come in bursts
        self.last_seen = {msg: t for msg, t in self.last_seen.items() if now - t < self.time_window}
        if message in self.last_seen:
            return False
        self.last_seen[message] = now
        return True


logger = logging.getLogger("bbcode_mode")

if not logger.handlers:
    logger.setLevel(logging.DEBUG)
    formatter = logging.Formatter('%(asctime)s - %(levelname)s - %(module)s - %(funcName)s - %(message)s')

    # on the logger, not the handlers, so a record is checked once
    logger.addFilter(DuplicateFilter(time_window=0.5))

    # 'w' so every editor session starts with a clean log
    fh = logging.FileHandler(log_file_path, mode='w', encoding='utf-8', delay=True)
    fh.setLevel(logging.DEBUG)
    fh.setFormatter(formatter)
    logger.addHandler(fh)

    ch = logging.StreamHandler()
    ch.setLevel(logging.INFO)
    ch.setFormatter(formatter)
    if hasattr(ch.stream, 'reconfigure'):
        ch.stream.reconfigure(encoding='utf-8')
    logger.addHandler(ch)

def log_debug(message: str):
    logger.debug(message)

def log_info(message: str):
    logger.info(message)

def log_warning(message: str):
    logger.warning(message)

def log_error(message: str, exc_info=False):
    logger.error(message, exc_info=exc_info)
