from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool

from message_board.models import MessageList, SubmitResult
from message_board.utils.config import get_bool_config
from message_board.utils.logger import log
from message_board.utils.store import MessageStore, get_store
from message_board.utils.validation import validate_submission

router = APIRouter(prefix="/api")


def error_response(status_code: int, error: str, details: str = None):
    content = {"error": error}
    if details is not None:
        content["details"] = details
    return JSONResponse(status_code=status_code, content=content)


@router.get("/messages", response_model=MessageList)
def list_messages(store: MessageStore = Depends(get_store)):
    """Return the 20 most recent messages, newest first."""
    try:
        result = MessageList(messages=store.list_recent())
    except Exception as e:
        log("error", "Messages", "Failed to fetch messages", str(e))
        return error_response(500, "Failed to fetch messages", str(e))

    return result


@router.post("/messages", status_code=201, response_model=SubmitResult)
async def submit_message(request: Request, store: MessageStore = Depends(get_store)):
    """
    Validate and store a new message.

    Body parse failures are reported like store failures unless
    STRICT_JSON_BODY is enabled, in which case they are a 400.
    """
    try:
        try:
            payload = await request.json()
        except ValueError:
            if get_bool_config("STRICT_JSON_BODY"):
                return error_response(400, "Invalid JSON body")
            raise

        error = validate_submission(payload)
        if error:
            return error_response(400, error)

        new_id = await run_in_threadpool(
            store.insert, payload["name"], payload["email"], payload["message"]
        )
    except Exception as e:
        log("error", "Messages", "Failed to submit message", str(e))
        return error_response(500, "Failed to submit message", str(e))

    log("info", "Messages", f"Message {new_id} submitted")
    return {"success": True, "message": "Message submitted successfully", "id": new_id}
