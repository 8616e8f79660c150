from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, localcontext

_CURRENCY_SYMBOLS = {
    "USD": "$",
    "EUR": "€",
    "GBP": "£",
    "JPY": "¥",
    "BRL": "R$",
}

_CENTS = Decimal("0.01")


@dataclass(frozen=True)
class Money:
    """
    Value Object universal: importe finito no negativo en una divisa ISO 4217.
    Building block reusable en CUALQUIER sistema que maneje precios.
    """

    amount: Decimal
    currency_code: str

    def __post_init__(self):
        # is_finite() primero: comparar NaN con '<' lanza InvalidOperation
        if not self.amount.is_finite():
            raise ValueError(f"El importe debe ser finito: {self.amount}")
        if self.amount < 0:
            raise ValueError(f"El importe no puede ser negativo: {self.amount}")
        if (
            len(self.currency_code) != 3
            or not self.currency_code.isalpha()
            or not self.currency_code.isupper()
        ):
            raise ValueError(f"Código de divisa inválido: {self.currency_code!r}")

    def format(self) -> str:
        """Representación legible: '$4.99', o '4.99 XYZ' si no hay símbolo."""
        with localcontext() as ctx:
            # Dígitos enteros + 2 decimales, para que quantize nunca desborde
            ctx.prec = max(ctx.prec, self.amount.adjusted() + 3)
            quantized = self.amount.quantize(_CENTS)

        symbol = _CURRENCY_SYMBOLS.get(self.currency_code)
        if symbol is None:
            return f"{quantized} {self.currency_code}"
        return f"{symbol}{quantized}"
