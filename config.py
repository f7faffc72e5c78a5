import os
from dotenv import load_dotenv

load_dotenv()

class Config:
    # Email opt-in relay
    SUBSCRIBE_WEBHOOK_URL = os.getenv('SUBSCRIBE_WEBHOOK_URL')
    SUBSCRIBE_SOURCE = os.getenv('SUBSCRIBE_SOURCE', 'prjct-zenith-calculator')
    SUBSCRIBE_TIMEOUT = float(os.getenv('SUBSCRIBE_TIMEOUT', '10'))

    # App Settings
    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
    PAGE_TITLE = 'PRJCT ZENITH GROWTH CALCULATOR'
