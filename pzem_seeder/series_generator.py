"""
Synthetic PZEM-004T telemetry generator
One reading per day with a steadily accumulating energy counter
"""
from dataclasses import dataclass, field
from datetime import date, datetime
from enum import IntEnum
from typing import Dict, List, Optional, Tuple

import numpy as np
import pandas as pd

from pzem_seeder.exceptions import InputError

# Sampling ranges (min, max)
VOLTAGE_RANGE = (225.0, 245.0)
CURRENT_RANGE = (0.01, 1.0)
POWER_FACTOR_RANGE = (0.8, 0.9)
FREQUENCY_RANGE = (49.8, 49.9)


class EnergyMode(IntEnum):
    """Magnitude of the simulated energy counter"""
    NORMAL = 1
    GREATER = 2

    @property
    def initial_range(self) -> Tuple[float, float]:
        if self is EnergyMode.NORMAL:
            return (0.5, 1.0)
        return (150.0, 250.0)

    @property
    def step(self) -> float:
        """Energy added between consecutive days"""
        return 0.003 if self is EnergyMode.NORMAL else 0.5


@dataclass(frozen=True)
class TelemetryRecord:
    """One day's simulated power-meter reading"""
    voltage: float
    current: float
    power: float
    energy: float
    frequency: float
    power_factor: float
    date: date
    time: str
    created_at: datetime = field(default_factory=datetime.now)

    def to_document(self) -> Dict:
        """
        MongoDB document for this reading

        Keys follow the existing pzemdatas collection ('pf', 'timestamp').
        """
        return {
            'voltage': self.voltage,
            'current': self.current,
            'power': self.power,
            'energy': self.energy,
            'frequency': self.frequency,
            'pf': self.power_factor,
            'date': self.date.isoformat(),
            'time': self.time,
            'timestamp': self.created_at,
        }


def _coerce_mode(mode) -> EnergyMode:
    try:
        return EnergyMode(mode)
    except ValueError:
        raise InputError(f"Invalid energy mode: {mode!r} (choose 1 for normal, 2 for greater)") from None


def _uniform(rng: np.random.Generator, bounds: Tuple[float, float], decimals: int) -> float:
    return round(float(rng.uniform(bounds[0], bounds[1])), decimals)


def format_time(dt: datetime) -> str:
    """
    Format the clock time in 12-hour form

    Args:
        dt: datetime to format

    Returns:
        String like '9:05:07 PM' (no leading zero on the hour, midnight is 12)
    """
    hours = dt.hour % 12 or 12
    ampm = 'PM' if dt.hour >= 12 else 'AM'
    return f"{hours}:{dt.minute:02d}:{dt.second:02d} {ampm}"


def initial_energy(mode, rng: Optional[np.random.Generator] = None) -> float:
    """
    Starting value of the energy counter

    Args:
        mode: EnergyMode or its integer code (1 normal, 2 greater)
        rng: Random generator (a fresh one if omitted)

    Returns:
        Energy rounded to 3 decimals

    Raises:
        InputError: If mode is not one of the two modes
    """
    mode = _coerce_mode(mode)
    rng = rng if rng is not None else np.random.default_rng()
    return _uniform(rng, mode.initial_range, 3)


def sample(energy: float, rng: Optional[np.random.Generator] = None,
           when: Optional[datetime] = None) -> TelemetryRecord:
    """
    Draw one reading around the supplied energy value

    Args:
        energy: Cumulative energy for this step
        rng: Random generator (a fresh one if omitted)
        when: Simulated moment for date/time stamping (defaults to now)

    Returns:
        TelemetryRecord with freshly randomized electrical values
    """
    rng = rng if rng is not None else np.random.default_rng()
    when = when if when is not None else datetime.now()

    voltage = _uniform(rng, VOLTAGE_RANGE, 1)
    power_factor = _uniform(rng, POWER_FACTOR_RANGE, 2)
    current = _uniform(rng, CURRENT_RANGE, 3)
    frequency = _uniform(rng, FREQUENCY_RANGE, 1)
    power = round(voltage * current * power_factor, 2)

    return TelemetryRecord(
        voltage=voltage,
        current=current,
        power=power,
        energy=round(float(energy), 3),
        frequency=frequency,
        power_factor=power_factor,
        date=when.date(),
        time=format_time(when),
    )


def generate(start: datetime, end: datetime, mode,
             rng: Optional[np.random.Generator] = None,
             initial: Optional[float] = None,
             verbose: bool = False) -> List[TelemetryRecord]:
    """
    Build the daily series from start to end (inclusive)

    Every day carries start's clock time. Energy grows by the mode step
    after each record.

    Args:
        start: First simulated day
        end: Last simulated day
        mode: EnergyMode or its integer code
        rng: Random generator (a fresh one if omitted)
        initial: Fixed starting energy instead of a random one
        verbose: Print each prepared record

    Returns:
        List of records in ascending date order
    """
    mode = _coerce_mode(mode)
    rng = rng if rng is not None else np.random.default_rng()

    start = pd.Timestamp(start)
    end = pd.Timestamp(end)
    days = (end.normalize() - start.normalize()).days + 1
    if days < 1:
        raise ValueError(f"End date {end.date()} is before start date {start.date()}")

    energy = round(float(initial), 3) if initial is not None else initial_energy(mode, rng)

    records = []
    for day in pd.date_range(start=start, periods=days, freq='D'):
        record = sample(energy, rng, when=day.to_pydatetime())
        records.append(record)
        if verbose:
            print(f"   Prepared record: {record.to_document()}")
        energy = round(energy + mode.step, 3)

    return records


def default_date_range(now: Optional[datetime] = None, months: int = 2) -> Tuple[datetime, datetime]:
    """Range from `months` calendar months ago up to now"""
    now = now if now is not None else datetime.now()
    start = pd.Timestamp(now) - pd.DateOffset(months=months)
    return start.to_pydatetime(), now


def records_to_dataframe(records: List[TelemetryRecord]) -> pd.DataFrame:
    """Records as a DataFrame in document shape"""
    return pd.DataFrame([record.to_document() for record in records])
