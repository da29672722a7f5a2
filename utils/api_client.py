#!/usr/bin/python3

# =============================================================================
#
# Copyright 2017 by Leland Lucius
#
# Released under the GNU Affero GPL
# See: https://github.com/lllucius/climacast/blob/master/LICENSE
#
# =============================================================================

"""
API client for the Alexa service clients (Device Address).
"""

from functools import partial

from ask_sdk_core.api_client import DefaultApiClient

from utils.config import Config


class TimeoutApiClient(DefaultApiClient):
    """
    DefaultApiClient that gives up on a request after a timeout.
    """

    def __init__(self, timeout=None):
        super().__init__()
        self.timeout = Config.HTTP_TIMEOUT if timeout is None else timeout

    def _resolve_method(self, request):
        return partial(super()._resolve_method(request), timeout=self.timeout)
