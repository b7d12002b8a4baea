import uvicorn

from treeqr.api.server import create_app
from treeqr.config.settings import Settings
from treeqr.database.connection import close_firebase, init_firebase
from treeqr.logging.logger import Log
from treeqr.pipeline.pipeline import build_audio_proxy, build_pipeline


def main() -> None:
    """Entry point: initialize Firebase -> build dependencies -> serve HTTP."""
    settings = Settings()
    Log.configure(settings.log_level)
    init_firebase(settings)

    try:
        pipeline = build_pipeline(settings)
        audio_proxy = build_audio_proxy(settings)
        try:
            app = create_app(pipeline, audio_proxy, settings)
            Log.info(
                f"Server starting at http://{settings.server_host}:{settings.server_port}"
            )
            uvicorn.run(
                app,
                host=settings.server_host,
                port=settings.server_port,
                log_level=settings.log_level.lower(),
            )
        finally:
            audio_proxy.close()
    finally:
        close_firebase()


if __name__ == "__main__":
    main()
