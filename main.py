import uvicorn
from dotenv import load_dotenv
from fastapi.middleware.cors import CORSMiddleware

load_dotenv()  # Load environment variables from a .env file

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles

from core.config import Settings, settings as default_settings
from core.logging_config import setup_logging
from middleware.image_resizer import add_image_resizer


def create_app(settings: Settings = default_settings) -> FastAPI:
    app = FastAPI(title="Image Resizer")

    # Configure CORS
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],  # Allows all origins
        allow_credentials=True,
        allow_methods=["*"],  # Allows all methods
        allow_headers=["*"],  # Allows all headers
    )

    # El resizer va antes que los archivos estáticos
    add_image_resizer(app, web_root=settings.WEB_ROOT_PATH)
    app.mount(
        "/",
        StaticFiles(directory=settings.WEB_ROOT_PATH, html=True, check_dir=False),
        name="static"
    )
    return app


setup_logging()
app = create_app()


# Punto de entrada para ejecutar la aplicación
if __name__ == "__main__":
    uvicorn.run(
        "main:app",  # Módulo y nombre de la aplicación
        host=default_settings.HOST,
        port=default_settings.PORT,
        reload=default_settings.RELOAD,  # Recarga automática en desarrollo
        log_level=default_settings.LOG_LEVEL.lower()  # Nivel de logs
    )
