from slowapi import Limiter
from slowapi.util import get_remote_address

# Shared by every router so one storage backs all rate limits
limiter = Limiter(key_func=get_remote_address)
