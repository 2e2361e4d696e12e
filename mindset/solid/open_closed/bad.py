class Discount:
    """
    Violates the Open/Closed Principle.

    Every new customer type means another branch in `calculate_discount`,
    so existing, tested code has to be edited to add behavior.
    An unknown customer type silently gets no discount.
    """

    def calculate_discount(self, customer_type: str, price: float) -> float:
        if customer_type == "Regular":
            return price * 0.1
        if customer_type == "VIP":
            return price * 0.2
        return 0
