from typing import Optional

from ..models.create_estimate_request import CreateEstimateRequest
from ..models.create_estimate_response import CreateEstimateResponse
from .service import Service


class EstimateService(Service):
    """Price/size/distance quotes for prospective shipments."""

    def create(self, estimate: CreateEstimateRequest, *, timeout: Optional[float] = None) -> CreateEstimateResponse:
        """Create Estimate

        Args:
            estimate (CreateEstimateRequest):
            timeout (float | None): Seconds allowed for this call

        Raises:
            errors.APIError: If the API answers with a non-2xx status.
            httpx.TimeoutException: If the request takes longer than the timeout.

        Returns:
            CreateEstimateResponse
        """
        request = self.client.create_request("POST", "estimates", body=estimate, timeout=timeout)
        return self.client.do(request, CreateEstimateResponse.from_dict)

    async def create_async(
        self, estimate: CreateEstimateRequest, *, timeout: Optional[float] = None
    ) -> CreateEstimateResponse:
        """Create Estimate

        Args:
            estimate (CreateEstimateRequest):
            timeout (float | None): Seconds allowed for this call

        Raises:
            errors.APIError: If the API answers with a non-2xx status.
            httpx.TimeoutException: If the request takes longer than the timeout.
            asyncio.CancelledError: If the awaiting task is cancelled.

        Returns:
            CreateEstimateResponse
        """
        request = self.client.create_request("POST", "estimates", body=estimate, timeout=timeout)
        return await self.client.do_async(request, CreateEstimateResponse.from_dict)
