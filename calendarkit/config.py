# calendarkit/config.py - settings read from the environment (.env supported)
import os
from dotenv import load_dotenv

load_dotenv()

BOT_TOKEN = os.getenv('BOT_TOKEN')
CALENDAR_CULTURE = os.getenv('CALENDAR_CULTURE', 'en')
CALENDAR_VIEW = os.getenv('CALENDAR_VIEW', 'default')
LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO').upper()
