import redis


def init_extensions(app, redis_client=None):
    if redis_client is None:
        redis_client = redis.Redis(
            host=app.config.get("REDIS_HOST", "localhost"),
            port=app.config.get("REDIS_PORT", 6379),
            db=app.config.get("REDIS_DB", 0),
        )
    app.extensions = getattr(app, "extensions", {})
    app.extensions["redis"] = redis_client
    return redis_client
