from fastapi import APIRouter, Depends, HTTPException, Response

from fittrack.api.deps import get_storage
from fittrack.schemas.measurement import (
    MeasurementCreate,
    MeasurementRead,
    MeasurementUpdate,
)
from fittrack.storage.base import Storage

router = APIRouter(prefix="/api/measurements", tags=["measurements"])


@router.get("/{user_id}", response_model=list[MeasurementRead])
def list_measurements(user_id: int, storage: Storage = Depends(get_storage)):
    return storage.get_measurements(user_id)


# Registered before /{user_id}/{measurement_id} so "latest" is not parsed as an id
@router.get("/{user_id}/latest", response_model=MeasurementRead)
def latest_measurement(user_id: int, storage: Storage = Depends(get_storage)):
    measurement = storage.get_latest_measurement(user_id)
    if not measurement:
        raise HTTPException(status_code=404, detail="No measurements found")
    return measurement


@router.get("/{user_id}/{measurement_id}", response_model=MeasurementRead)
def get_measurement(
    user_id: int, measurement_id: int, storage: Storage = Depends(get_storage)
):
    measurement = storage.get_measurement(measurement_id)
    if not measurement:
        raise HTTPException(status_code=404, detail="Measurement not found")
    return measurement


@router.post("", response_model=MeasurementRead, status_code=201)
def create_measurement(
    payload: MeasurementCreate, storage: Storage = Depends(get_storage)
):
    return storage.create_measurement(payload)


@router.put("/{measurement_id}", response_model=MeasurementRead)
def update_measurement(
    measurement_id: int,
    payload: MeasurementUpdate,
    storage: Storage = Depends(get_storage),
):
    measurement = storage.update_measurement(measurement_id, payload)
    if not measurement:
        raise HTTPException(status_code=404, detail="Measurement not found")
    return measurement


@router.delete("/{measurement_id}", status_code=204)
def delete_measurement(measurement_id: int, storage: Storage = Depends(get_storage)):
    if not storage.delete_measurement(measurement_id):
        raise HTTPException(status_code=404, detail="Measurement not found")
    return Response(status_code=204)
