# File: vocalcoach/core/database/base.py

from sqlalchemy.orm import declarative_base

# Shared registry for every feature's persisted models.
Base = declarative_base()
