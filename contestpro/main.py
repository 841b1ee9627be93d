import os
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from contextlib import asynccontextmanager
from dotenv import load_dotenv

from contestpro.database import Database
from contestpro.core.exceptions import register_exception_handlers
from contestpro.routes.auth.auth_routes import router as auth_router
from contestpro.routes.users.user_routes import router as user_router
from contestpro.routes.contest.contest_routes import router as contest_router
from contestpro.routes.contest.participant_routes import router as participant_router
from contestpro.routes.payment.payment_routes import router as payment_router

# Load environment variables
load_dotenv()

# Get environment variables
APP_NAME = os.getenv("APP_NAME", "ContestPro")
APP_VERSION = os.getenv("APP_VERSION", "1.0.0")
FRONTEND_URL = os.getenv("FRONTEND_URL", "http://localhost:5173")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan events for the application"""
    # Startup
    await Database.connect_db()
    yield
    # Shutdown
    await Database.close_db()


app = FastAPI(
    title=APP_NAME,
    version=APP_VERSION,
    description="ContestPro API: users, contests, participations and entry fee payments",
    lifespan=lifespan
)

# CORS middleware
# In development, allow all origins for easier testing
DEBUG = os.getenv("DEBUG", "True").lower() == "true"

cors_origins = [
    FRONTEND_URL,
    "http://localhost:5173",
    "http://localhost:3000",
]

app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins if not DEBUG else ["*"],
    allow_credentials=not DEBUG,  # Can't use credentials with wildcard origin
    allow_methods=["*"],
    allow_headers=["*"],
)

register_exception_handlers(app)

# Paths are served at the root, as the web client expects
app.include_router(auth_router)
app.include_router(user_router)
app.include_router(contest_router)
app.include_router(participant_router)
app.include_router(payment_router)


@app.get("/", response_class=PlainTextResponse)
async def read_root():
    """Root endpoint"""
    return "Contest Pro in running!"


@app.get("/health")
async def health_check():
    """Health check endpoint"""
    return {"status": "healthy"}


if __name__ == "__main__":
    import uvicorn

    port = int(os.getenv("PORT", "5000"))
    print(f"[OK] Contest pro is running on port: {port}")
    uvicorn.run("contestpro.main:app", host="0.0.0.0", port=port)
