# kforum/main.py
import logging
import os

from dotenv import load_dotenv
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from kforum.db.mongo import init_db_indexes

# Routers
from kforum.routes.posts import router as posts_router
from kforum.routes.admin import router as admin_router
from kforum.routes.wordle import router as wordle_router

load_dotenv()

logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

# ---------------------------
# Build FastAPI app
# ---------------------------
fastapi_app = FastAPI(title="KForum Backend", version="1.0.0")

# CORS: wide open for now, tighten for production
fastapi_app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

@fastapi_app.get("/health")
async def health_check():
    return {"status": "OK", "message": "KForum backend is running."}

@fastapi_app.get("/")
async def root():
    return {"message": "Welcome to the KForum API"}

# ---------------------------
# Routers
# ---------------------------
fastapi_app.include_router(posts_router)
fastapi_app.include_router(admin_router)
fastapi_app.include_router(wordle_router)


# ---------------------------
# Startup tasks
# ---------------------------
@fastapi_app.on_event("startup")
async def on_startup():
    try:
        await init_db_indexes()
    except Exception:
        # Don't crash the app if indexes fail; just log it
        logging.exception("Index init error")

app = fastapi_app
