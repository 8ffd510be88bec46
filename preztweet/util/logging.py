
"""
Logging utilities
"""

####################
### Imports
####################

## Standard Library
import sys
import logging

####################
### Functions
####################

def initialize_logger(level=logging.INFO,
                      name="preztweet"):
    """
    Create a logger that writes timestamped messages to standard output.

    Args:
        level (int): Logging level. Default is INFO
        name (str): Name of the logger
    
    Returns:
        logger (Logger): Configured logger
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)
    if not logger.handlers:
        handler = logging.StreamHandler(sys.stdout)
        formatter = logging.Formatter("%(asctime)s %(levelname)s - %(message)s",
                                      datefmt="%Y-%m-%d %I:%M:%S %p")
        handler.setFormatter(formatter)
        logger.addHandler(handler)
        logger.propagate = False
    return logger
