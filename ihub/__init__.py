# ihub/__init__.py
from .config import settings
from .database import Base, create_store, get_db
from . import models
from . import schemas
from . import services
from . import api

__version__ = "0.1.0"
