import logging
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from api.assignment_routes import router as assignment_router
from api.status import router as status_router
from config import settings
from core.load_plugins import load_plugins
from contextlib import asynccontextmanager

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    load_plugins()
    yield


app = FastAPI(title="Ride Assignment Backend", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ALLOW_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Register API routes
app.include_router(assignment_router)
app.include_router(status_router)

if __name__ == "__main__":
    import uvicorn

    uvicorn.run("main:app", host="127.0.0.1", port=8000, reload=True)
