"""Operation dispatch for `POST /bfhl`.

Control-flow model:
    The classifier hands over one typed operation; `execute` maps it onto the
    numeric kernel or the AI answer service and returns the envelope `data`.

Concurrency:
    Numeric work runs in the worker thread pool so a long trial division never
    stalls the event loop serving other requests.

Error handling strategy:
    Numeric branches never fail for classified input. The `AI` branch propagates
    `AIProviderError` to the API boundary, which picks the HTTP status.
"""

from starlette.concurrency import run_in_threadpool

from bfhl.core import numeric
from bfhl.core.operations import (
    AIOperation,
    FibonacciOperation,
    HcfOperation,
    LcmOperation,
    Operation,
    PrimeOperation,
)
from bfhl.llm.service import AnswerService


async def execute(operation: Operation, answer_service: AnswerService):
    """Run one classified operation and return its result value."""
    if isinstance(operation, FibonacciOperation):
        return numeric.fibonacci(operation.count)
    if isinstance(operation, PrimeOperation):
        return await run_in_threadpool(numeric.filter_primes, operation.values)
    if isinstance(operation, LcmOperation):
        return await run_in_threadpool(numeric.lcm_of, operation.values)
    if isinstance(operation, HcfOperation):
        return await run_in_threadpool(numeric.hcf_of, operation.values)
    if isinstance(operation, AIOperation):
        return await answer_service.answer(operation.question)
    raise TypeError(f"Unsupported operation: {operation!r}")
