"""Display helpers for wallet addresses."""


def format_wallet_address(address: str, chars: int = 4) -> str:
    """Shorten an address to 'abcd...wxyz'. Short or empty addresses pass through."""
    if not address or len(address) < chars * 2:
        return address
    return f"{address[:chars]}...{address[-chars:]}"
