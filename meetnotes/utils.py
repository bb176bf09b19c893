import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from meetnotes.logs import uvicorn_log_config


def create_app(**kwargs):
    app = FastAPI(**kwargs)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=['*'],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    return app


async def create_webserver(app, port):
    server_config = uvicorn.Config(
        app,
        host='0.0.0.0',
        port=port,
        log_config=uvicorn_log_config,
    )
    server = uvicorn.Server(server_config)
    await server.serve()
