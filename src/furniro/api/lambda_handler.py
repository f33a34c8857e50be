"""Entry point for serverless platforms that invoke an ASGI handler."""

from mangum import Mangum

from furniro.api.app import app

# ASGI lifespan events are not delivered per invocation.
handler = Mangum(app, lifespan="off")
