from location_service.infrastructure.common.schemas.error_schemas import HTTPError

__all__ = ["HTTPError"]
