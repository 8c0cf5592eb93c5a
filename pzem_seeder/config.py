"""
Configuration for the PZEM seeder
Values come from .env or the environment
"""
import os
from dotenv import load_dotenv

load_dotenv()

MONGODB_URI = os.getenv('MONGODB_URI', 'mongodb://localhost:27017')
DB_NAME = os.getenv('PZEM_DB_NAME', 'pzemdata23')
COLLECTION_NAME = os.getenv('PZEM_COLLECTION', 'pzemdatas1')


def parse_history_months(value: str) -> int:
    """Months of history to generate, from PZEM_HISTORY_MONTHS"""
    try:
        months = int(value)
    except ValueError:
        raise ValueError(f"❌ PZEM_HISTORY_MONTHS must be a whole number, got {value!r}") from None
    if months < 0:
        raise ValueError(f"❌ PZEM_HISTORY_MONTHS must not be negative, got {months}")
    return months


# How far back the generated series reaches (calendar months)
HISTORY_MONTHS = parse_history_months(os.getenv('PZEM_HISTORY_MONTHS', '2'))

# Print every prepared record before insertion
VERBOSE = os.getenv('PZEM_VERBOSE', '').lower() in ('1', 'true', 'yes')
