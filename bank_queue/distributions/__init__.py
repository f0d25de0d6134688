"""Random variable distributions for the bank queue."""

from .random_variables import (
    MIN_SERVICE_TIME,
    MAX_SERVICE_TIME,
    MAX_POISSON_LAMBDA,
    make_rng,
    sample_poisson,
    sample_service_time,
    poisson_distribution,
    service_time_distribution,
    deterministic_distribution,
    scripted_arrivals,
    arrivals_at,
)

__all__ = [
    'MIN_SERVICE_TIME',
    'MAX_SERVICE_TIME',
    'MAX_POISSON_LAMBDA',
    'make_rng',
    'sample_poisson',
    'sample_service_time',
    'poisson_distribution',
    'service_time_distribution',
    'deterministic_distribution',
    'scripted_arrivals',
    'arrivals_at',
]
