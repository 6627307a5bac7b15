from fastapi import Request

UNKNOWN_CLIENT = "unknown"

def resolve_client_id(request: Request) -> str:
    """
    Best-effort client address used as the rate limit key.

    Order: first X-Forwarded-For entry, X-Real-IP, socket peer, "unknown".
    Headers are trusted as-is, so the key is spoofable.
    """
    forwarded_for = request.headers.get("x-forwarded-for")
    if forwarded_for:
        first = forwarded_for.split(",")[0].strip()
        if first:
            return first

    real_ip = request.headers.get("x-real-ip")
    if real_ip:
        return real_ip.strip()

    if request.client and request.client.host:
        return request.client.host

    return UNKNOWN_CLIENT
