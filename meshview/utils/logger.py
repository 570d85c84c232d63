# meshview/utils/logger.py
# ---------------------------------------------------------------
# Минимальный логгер для всего пакета.
# ---------------------------------------------------------------

import logging


def init_logger():
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    return logging.getLogger("meshview")


logger = init_logger()
