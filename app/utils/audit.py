"""Audit logging for master-data writes."""

from fastapi import Request

from app.utils.logging import get_logger

audit_log = get_logger("audit")


def audit_logged(action: str):
    """Dependency factory that records who touched which coded entity.

    The request id and path are already bound to the log context by
    ``RequestIDMiddleware``; this adds the action, the client address and,
    for routes addressed by code, the entity code.

    Usage::

        @router.put("/{code}", dependencies=[Depends(audit_logged("update_customer"))])
    """

    async def _record(request: Request) -> None:
        audit_log.info(
            "audit",
            action=action,
            client_ip=request.client.host if request.client else "unknown",
            code=request.path_params.get("code"),
        )

    return _record
