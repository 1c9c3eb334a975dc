
# entrypoint: run with `python main.py` or `uvicorn main:app`
from app.core.logging import configure_logging
from app.core.settings import get_settings
from app.factory import create_app

settings = get_settings()
configure_logging(level=settings.log_level, json_logs=settings.log_json)

app = create_app(settings)

if __name__ == "__main__":
    import uvicorn  # nosec - dev server
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)
