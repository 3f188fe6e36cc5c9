# src/router/routers.py

from fastapi import FastAPI
from src.modules.bookings.booking_controller import router as booking_router
from src.modules.contact.contact_controller import router as contact_router

def include_routers(app: FastAPI) -> None:
    app.include_router(booking_router)
    app.include_router(contact_router)
