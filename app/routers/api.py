from fastapi import APIRouter, Depends, Request, Response

from ..models.record import Record
from ..services.records import RecordService

router = APIRouter(prefix="/api", tags=["api"])


def get_service(request: Request) -> RecordService:
    return request.app.state.records


# Plain ``def`` routes run on the threadpool; the store and cache locks are
# threading locks.
@router.post("/movie")
def create_record(record: Record, service: RecordService = Depends(get_service)):
    service.put(record)
    return Response(status_code=200)


@router.get("/movie/{record_id}", response_model=Record)
def read_record(record_id: str, service: RecordService = Depends(get_service)):
    return service.get(record_id)


@router.get("/cache/stats")
def cache_stats(service: RecordService = Depends(get_service)):
    stats = service.cache.stats()
    return {
        "enabled": service.cache_enabled,
        "hits": stats.hits,
        "misses": stats.misses,
        "evictions": stats.evictions,
        "invalidations": stats.invalidations,
        "size": stats.size,
        "capacity": stats.capacity,
    }
