"""Pydantic schemas for the legacy v2 gateway."""

from __future__ import annotations

from enum import Enum

from nutanix_client.schemas.common import NutanixModel


class PowerState(str, Enum):
    """Power transitions accepted by ``set_power_state``."""

    ON = "ON"
    OFF = "OFF"
    POWERCYCLE = "POWERCYCLE"
    RESET = "RESET"
    PAUSE = "PAUSE"
    SUSPEND = "SUSPEND"
    RESUME = "RESUME"
    SAVE = "SAVE"
    ACPI_SHUTDOWN = "ACPI_SHUTDOWN"
    ACPI_REBOOT = "ACPI_REBOOT"


class VMPowerStateCreate(NutanixModel):
    transition: PowerState
    host_uuid: str | None = None
    uuid: str | None = None


class Task(NutanixModel):
    task_uuid: str | None = None
