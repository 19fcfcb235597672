"""
Configuration — variables d'environnement.
"""
import os

LOG_LEVEL    = os.getenv("SURVEY_BUILDER_LOG_LEVEL", "INFO").upper()
FORM_TITLE   = os.getenv("SURVEY_BUILDER_TITLE", "Custom Survey")
FORM_LANG    = os.getenv("SURVEY_BUILDER_LANG", "fr")
LOG_FORMAT   = "%(asctime)s %(levelname)s — %(message)s"
MAX_CHOICES  = int(os.getenv("SURVEY_BUILDER_MAX_CHOICES", "50"))
