import logging

logger = logging.getLogger("treeset")
