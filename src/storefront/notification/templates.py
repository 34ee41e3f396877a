"""Order confirmation template: sent when an order is placed."""


class OrderConfirmationTemplate:
    subject = "Order Confirmation"

    @staticmethod
    def render(context: dict) -> dict:
        order_id = context.get("order_id", "N/A")
        total = float(context.get("total_amount", 0.0))
        return {
            "subject": OrderConfirmationTemplate.subject,
            "sms_body": f"Your order {order_id} has been placed. Total: {total:.2f}",
            "email_body": (
                "Dear customer,\n\n"
                f"Your order {order_id} for {total:.2f} was successful!\n\n"
                "Thank you for shopping with us."
            ),
        }
