class PaymentHandleRepo:
    async def find_handle_id(self, order_id: int) -> str | None:
        raise NotImplementedError

    async def insert_handle(self, order_id: int, handle_id: str) -> None:
        """Record the mapping; raises DuplicateHandleError if the order already has one."""
        raise NotImplementedError
