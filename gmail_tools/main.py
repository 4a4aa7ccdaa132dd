from contextlib import asynccontextmanager
from datetime import datetime, timezone

from fastapi import FastAPI
from gmail_tools.config import CFG
from gmail_tools.routes import router
from gmail_tools.utils.logger import LogSink, logger
from gmail_tools.utils.utils import get_version


@asynccontextmanager
async def lifespan(app: FastAPI):
    # Startup actions
    sink = LogSink(CFG.log_file)
    sink.open()
    app.state.log_sink = sink
    sink.append(f"[{datetime.now(timezone.utc).isoformat()}] server started")

    yield
    # Shutdown actions
    logger.info("Shutting down...")
    sink.close()


app = FastAPI(
    title="Gmail Tools",
    version=get_version(),
    lifespan=lifespan,
)


app.include_router(router, prefix="/v1")


def run():
    import uvicorn

    uvicorn.run(app, host=CFG.host, port=CFG.port)
