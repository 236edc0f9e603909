"""Domain → DTO mapping shared by several use cases."""

from __future__ import annotations

from pos.application.dto import BillDTO, BillLineDTO, DraftBillDTO
from pos.domain.model.bill import Bill
from pos.domain.model.bill_builder import BillBuilder


def bill_to_dto(bill: Bill) -> BillDTO:
    return BillDTO(
        id=bill.id,  # type: ignore[arg-type]
        status=bill.status.value,
        items=[
            BillLineDTO(
                position=i,
                product_name=item.product_name,
                barcode=item.barcode,
                quantity=item.quantity.value,
                unit_price=str(item.unit_price),
                line_total=str(item.total_price),
            )
            for i, item in enumerate(bill.items, start=1)
        ],
        total=str(bill.total_amount),
        item_count=bill.item_count,
        created_at=bill.created_at.strftime("%Y-%m-%d %H:%M UTC"),
        payment_method=bill.payment_method,
        customer_name=bill.customer_name,
        customer_phone=bill.customer_phone,
    )


def draft_to_dto(builder: BillBuilder) -> DraftBillDTO:
    return DraftBillDTO(
        items=[
            BillLineDTO(
                position=i,
                product_name=item.product.name,
                barcode=item.product.barcode,
                quantity=item.quantity,
                unit_price=str(item.product.price),
                line_total=str(item.total_price),
            )
            for i, item in enumerate(builder.items, start=1)
        ],
        total=str(builder.total()),
    )
