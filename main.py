# main.py
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
import logging

import config
from routes import courses, dashboard, students
from services.dashboard import DashboardController
from services.mock_api import MockApi
from services.storage import FileStorage, LocalStorageHelper

# Set up logging
logging.basicConfig(level=config.LOG_LEVEL)
logger = logging.getLogger(__name__)

def build_dashboard() -> DashboardController:
    storage = None
    if config.PERSIST_STUDENTS:
        storage = LocalStorageHelper(FileStorage(config.STUDENT_STORAGE_PATH), key=config.STUDENT_STORAGE_KEY)
    return DashboardController(MockApi(), storage=storage)

app = FastAPI(title="Student Roster Dashboard")
app.state.dashboard = build_dashboard()

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(courses.router)
app.include_router(students.router)
app.include_router(dashboard.router)


@app.on_event("startup")
async def startup_event():
    logger.info("Mounting student dashboard")
    await app.state.dashboard.mount()

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("main:app", host="127.0.0.1", port=8000, reload=True)
