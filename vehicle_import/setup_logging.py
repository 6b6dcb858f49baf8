import logging, sys
from pathlib import Path

FORMAT = "%(asctime)s %(levelname)s %(name)s :: %(message)s"

def setup_logging(level: str = "INFO", log_dir: str | None = None):
    logger = logging.getLogger()
    if logger.handlers:  # don’t double add during reload
        return
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))
    fmt = logging.Formatter(FORMAT)

    h = logging.StreamHandler(sys.stdout)
    h.setFormatter(fmt)
    logger.addHandler(h)

    if log_dir:
        d = Path(log_dir)
        d.mkdir(parents=True, exist_ok=True)
        err = logging.FileHandler(d / "error.log")
        err.setLevel(logging.ERROR)
        err.setFormatter(fmt)
        combined = logging.FileHandler(d / "combined.log")
        combined.setFormatter(fmt)
        logger.addHandler(err)
        logger.addHandler(combined)
