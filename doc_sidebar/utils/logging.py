import logging, os
from datetime import datetime

from doc_sidebar.utils.io import config_dir

logger = logging.getLogger("doc_sidebar")

def init() -> None:
    if logger.handlers:
        return
    logger.setLevel(logging.DEBUG)

    ch = logging.StreamHandler()
    ch.setLevel(logging.INFO)
    ch.setFormatter(logging.Formatter("%(asctime)s %(levelname)s %(message)s"))
    logger.addHandler(ch)

    log_dir = config_dir() / "logs"
    os.makedirs(log_dir, exist_ok=True)
    fh = logging.FileHandler(log_dir / f"doc_sidebar_{datetime.now():%Y%m%d}.log")
    fh.setLevel(logging.DEBUG)
    fh.setFormatter(logging.Formatter("%(asctime)s %(levelname)s [%(name)s] %(message)s"))
    logger.addHandler(fh)

    logger.info("doc_sidebar logging initialized")
