# skillswap/common/rate_limit.py

from slowapi import Limiter
from slowapi.util import get_remote_address

# In-memory storage (resets on restart).
# With multiple workers, point storage_uri at a shared backend such as Redis.
limiter = Limiter(key_func=get_remote_address, default_limits=["60/minute"])
