"""
restargs — argument normalization and validation for REST API clients.

Endpoint methods accept positional arguments or an options mapping; restargs binds the
endpoint's required arguments onto the request object and leaves a canonical, string-keyed
parameter mapping for the request builder.

```python
from restargs import ApiRequest, ArgumentParser

request = ApiRequest()
parser = ArgumentParser(request, {"args_required": ["user", "repo"]})
parser.parse("octocat", "hello-world", {"per_page": 50}).sift(["per_page"])
request.user, parser.params  # ('octocat', {'per_page': 50})
```
"""

from __future__ import annotations

import logging

from .arguments import ArgumentParser, ArgumentsOptions, ArgumentsSettings, configure_logging
from .core import (
    ApiRequest,
    ArgumentsError,
    ArityError,
    MissingArgumentError,
    PresenceError,
    RequestContext,
    UnknownValueError,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "ApiRequest",
    "ArgumentParser",
    "ArgumentsError",
    "ArgumentsOptions",
    "ArgumentsSettings",
    "ArityError",
    "MissingArgumentError",
    "PresenceError",
    "RequestContext",
    "UnknownValueError",
    "configure_logging",
]
