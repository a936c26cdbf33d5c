"""
Transaction confirmation polling.

A poller repeatedly queries the status of one transaction until it reaches a
terminal state:

- ``ACCEPTED_ONCHAIN`` or ``PENDING``: confirmed
- ``REJECTED``: rejected (raises TransactionRejectedError)
- ``NOT_RECEIVED`` after the first poll: unreachable (raises
  TransactionUnreachableError). The first ``NOT_RECEIVED`` is forgiven since
  the network may not have indexed the transaction yet.
- anything else (``RECEIVED``, unknown statuses): keep waiting

There is no upper bound on the number of polls while the network keeps
reporting ``RECEIVED``.
"""
import logging
import time
from enum import Enum
from typing import Any, Callable, Optional

from .exceptions import TransactionRejectedError, TransactionUnreachableError
from .gateway._rate_limited_log import rate_limited_log
from .models import GetTransactionStatusResponse, TransactionStatus
from .utils.number import BigNumberish, to_hex

logger = logging.getLogger(__name__)


class PollerState(str, Enum):
    """States of a confirmation poller"""
    WAITING = "WAITING"
    CONFIRMED = "CONFIRMED"
    REJECTED = "REJECTED"
    UNREACHABLE = "UNREACHABLE"

    @property
    def is_terminal(self) -> bool:
        return self is not PollerState.WAITING


def next_state(tx_status: str, first_run: bool) -> PollerState:
    """
    Compute the poller state after observing a status.

    Args:
        tx_status: Raw status string reported by the feeder gateway
        first_run: Whether this is the first poll cycle

    Returns:
        The next poller state
    """
    if tx_status in (TransactionStatus.ACCEPTED_ONCHAIN, TransactionStatus.PENDING):
        return PollerState.CONFIRMED
    if tx_status == TransactionStatus.REJECTED:
        return PollerState.REJECTED
    if tx_status == TransactionStatus.NOT_RECEIVED and not first_run:
        return PollerState.UNREACHABLE
    return PollerState.WAITING


def _failure_reason(response: GetTransactionStatusResponse) -> Optional[str]:
    reason = response.tx_failure_reason
    if not reason:
        return None
    return reason.get("error_message") or str(reason)


class ConfirmationPoller:
    """
    Waits for one transaction to reach a terminal state.

    Each poll cycle sleeps for ``retry_interval`` seconds, then performs one
    status query. Cycles are strictly sequential. A poller touches no shared
    state, so several can run concurrently (e.g. one per thread), and a caller
    may simply stop calling :meth:`poll_once` to abandon it.
    """

    DEFAULT_RETRY_INTERVAL = 5.0
    # Seconds between "still waiting" warnings for the same transaction
    WAITING_LOG_INTERVAL = 60

    def __init__(
        self,
        gateway: Any,
        tx_hash: BigNumberish,
        retry_interval: Optional[float] = None,
        sleep: Optional[Callable[[float], None]] = None,
        logger_instance: Optional[logging.Logger] = None
    ):
        """
        Initialize the poller.

        Args:
            gateway: Object exposing ``get_transaction_status(tx_hash)``,
                usually a GatewayClient
            tx_hash: Transaction hash in any integer representation
            retry_interval: Delay before each status query, in seconds
            sleep: Sleep function (defaults to time.sleep)
            logger_instance: Logger to use (defaults to module logger)
        """
        self.gateway = gateway
        self.tx_hash = to_hex(tx_hash)
        self.retry_interval = (
            self.DEFAULT_RETRY_INTERVAL if retry_interval is None else retry_interval
        )
        self._sleep = sleep or time.sleep
        self.logger = logger_instance or logger

        self.state = PollerState.WAITING
        self.cycles = 0
        self.last_response: Optional[GetTransactionStatusResponse] = None
        self._first_run = True

    def poll_once(self) -> PollerState:
        """
        Run a single poll cycle.

        Returns:
            The state after this cycle. Once terminal, the state is returned
            without querying again.

        Raises:
            TransactionRejectedError: If the network rejected the transaction
            TransactionUnreachableError: If the transaction was never received
            GatewayError: If the status query itself fails
        """
        if self.state.is_terminal:
            return self.state

        self._sleep(self.retry_interval)
        response = self.gateway.get_transaction_status(self.tx_hash)
        self.cycles += 1
        self.last_response = response

        self.state = next_state(response.tx_status, self._first_run)
        self._first_run = False
        self.logger.debug(
            f"Poll {self.cycles} for {self.tx_hash}: {response.tx_status} -> {self.state.value}"
        )

        if self.state is PollerState.CONFIRMED:
            self.logger.info(f"Transaction {self.tx_hash} confirmed ({response.tx_status})")
        elif self.state is PollerState.REJECTED:
            reason = _failure_reason(response)
            self.logger.info(f"Transaction {self.tx_hash} rejected")
            raise TransactionRejectedError(self.tx_hash, response.tx_status, reason)
        elif self.state is PollerState.UNREACHABLE:
            self.logger.info(f"Transaction {self.tx_hash} was not received by the network")
            raise TransactionUnreachableError(self.tx_hash, response.tx_status)
        elif self.cycles > 1:
            rate_limited_log(
                f"Transaction {self.tx_hash} still {response.tx_status} after {self.cycles} polls",
                level="warning",
                interval=self.WAITING_LOG_INTERVAL,
                logger_instance=self.logger,
                key=f"waiting:{self.tx_hash}"
            )
        return self.state

    def wait(self) -> GetTransactionStatusResponse:
        """
        Poll until the transaction reaches a terminal state.

        Returns:
            The status response that confirmed the transaction

        Raises:
            TransactionRejectedError: If the network rejected the transaction
            TransactionUnreachableError: If the transaction was never received
        """
        while self.poll_once() is PollerState.WAITING:
            pass
        return self.last_response


def wait_for_tx(
    gateway: Any,
    tx_hash: BigNumberish,
    retry_interval: Optional[float] = None,
    sleep: Optional[Callable[[float], None]] = None
) -> GetTransactionStatusResponse:
    """Convenience wrapper around ConfirmationPoller.wait."""
    return ConfirmationPoller(gateway, tx_hash, retry_interval=retry_interval, sleep=sleep).wait()
