from .env import Env as Env
from .load_env import (
    configure as configure,
    load_env as load_env,
)
