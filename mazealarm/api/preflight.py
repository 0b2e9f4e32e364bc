"""CORS Preflight — OPTIONS on any path answers 200 with an empty body.

Invariants:
    - Runs before routing and authentication, independent of service state
    - Browser preflights carrying Origin/Access-Control-Request-Method are
      answered by CORSMiddleware (registered outside this one) with CORS headers
"""

from fastapi import Request, Response, status


async def preflight_middleware(request: Request, call_next):
    if request.method == "OPTIONS":
        return Response(status_code=status.HTTP_200_OK)
    return await call_next(request)
