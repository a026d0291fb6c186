r"""Client configuration and validation.

``ClientConfig`` is defined in ``decnet.core.config``.
"""

from __future__ import annotations

__all__ = ["validate_base_url", "validate_retry_params", "validate_timeout"]

from decnet.core.validation import validate_base_url, validate_retry_params, validate_timeout
