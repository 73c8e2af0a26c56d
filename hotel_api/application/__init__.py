"""
Application layer - hotel orders.

Use cases plus the ports (interfaces) that infrastructure adapters implement.

Structure:
- use_cases/: place an order, ensure its payment handle, list rooms
- interfaces/: store, gateway and transaction contracts
"""
