import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, Path

from dependencies import get_appointment_store
from models import UINT32_MAX, Appointment, AppointmentRequest, AppointmentUpdate
from responses import result_response
from store import AppointmentStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/appointments", tags=["Appointments"])


@router.post("", status_code=201, response_model=str)
def create_appointment(
    appointment: AppointmentRequest,
    store: AppointmentStore = Depends(get_appointment_store),
):
    """Book an appointment; the ID is assigned by the server"""
    return result_response(store.insert(appointment), logger)


@router.get("/{appointment_id}", response_model=Appointment)
def get_appointment(
    appointment_id: int = Path(ge=0, le=UINT32_MAX),
    store: AppointmentStore = Depends(get_appointment_store),
):
    appointment = store.get(appointment_id)
    if appointment is None:
        raise HTTPException(
            status_code=404,
            detail=f"Appointment with ID {appointment_id} not found.",
        )
    return appointment


@router.get("", response_model=List[Appointment])
def list_appointments(store: AppointmentStore = Depends(get_appointment_store)):
    return store.list()


@router.put("/{appointment_id}", response_model=str)
def update_appointment(
    update_data: AppointmentUpdate,
    appointment_id: int = Path(ge=0, le=UINT32_MAX),
    store: AppointmentStore = Depends(get_appointment_store),
):
    return result_response(store.update(appointment_id, update_data), logger)


@router.delete("/{appointment_id}", response_model=str)
def delete_appointment(
    appointment_id: int = Path(ge=0, le=UINT32_MAX),
    store: AppointmentStore = Depends(get_appointment_store),
):
    """Cancel an appointment; its ID is never handed out again"""
    return result_response(store.remove(appointment_id), logger)
