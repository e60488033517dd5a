import redis

from dietplan.config import RedisSettings

_settings = RedisSettings()

# Initialize Redis client (connects lazily on first command)
redis_client = redis.Redis(
    host=_settings.host,
    port=_settings.port,
    db=_settings.db,
    decode_responses=True  # Ensures output is returned as strings
)
