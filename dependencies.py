from fastapi import Request

from store import AppointmentStore, StaffStore, UserStore


def get_user_store(request: Request) -> UserStore:
    """Plain user store attached by create_app"""
    return request.app.state.user_store


def get_staff_store(request: Request) -> StaffStore:
    """Role/permission user store attached by create_app"""
    return request.app.state.staff_store


def get_appointment_store(request: Request) -> AppointmentStore:
    """Appointment store attached by create_app"""
    return request.app.state.appointment_store
