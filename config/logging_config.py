import logging.config

LOGGING_CONFIG = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'standard': {
            'format': '%(asctime)s [%(levelname)s] %(name)s: %(message)s'
        },
    },
    'handlers': {
        'default': {
            'level': 'INFO',
            'formatter': 'standard',
            'class': 'logging.StreamHandler',
            'stream': 'ext://sys.stdout',
        },
    },
    'loggers': {
        '': {  # root logger
            'handlers': ['default'],
            'level': 'INFO',
            'propagate': True
        },
        'pdfminer': {
            'level': 'WARNING',
            'propagate': False
        },
        'httpx': {
            'level': 'WARNING',
            'propagate': True
        },
        'src': {
            'level': 'INFO',
            'handlers': ['default'],
            'propagate': False
        }
    }
}

def setup_logging(level: str = None):
    """Configure logging for the application"""
    logging.config.dictConfig(LOGGING_CONFIG)
    if level:
        logging.getLogger('src').setLevel(level.upper())
