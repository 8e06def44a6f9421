from fastapi import APIRouter, Request

router = APIRouter()


@router.get("/health")
def health(request: Request):
    request.app.state.db.ping()
    return {"status": "ok"}
