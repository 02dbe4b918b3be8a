"""
Transfer endpoints
"""

from fastapi import APIRouter, HTTPException, Depends

from .dependencies import BankingSystem, get_banking_system
from .schemas import TransferRequest
from ..errors import InsufficientFundsError


router = APIRouter()


@router.post("")
async def transfer(
    request: TransferRequest,
    system: BankingSystem = Depends(get_banking_system)
):
    """Move funds between two accounts"""
    try:
        transferred = system.ledger.transfer(
            request.from_account_id, request.to_account_id, request.amount
        )
    except InsufficientFundsError as e:
        raise HTTPException(status_code=409, detail=str(e))

    if not transferred:
        raise HTTPException(status_code=404, detail="Source or destination account not found")

    return {
        "from_account_id": request.from_account_id,
        "to_account_id": request.to_account_id,
        "amount": request.amount,
        "message": "Transfer processed successfully"
    }
