# app/models/__init__.py

from .city import *
from .category import *
from .business import *
from .review import *
from .offer import *
from .admin import *
from .setting import *
from .activity_log import *
from .enums import *
# add all your models here for easy import elsewhere
