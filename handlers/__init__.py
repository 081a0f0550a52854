"""
handlers/ - Presentation Layer
================================
Telegram bot handlers. Each handler receives a command, delegates to
PortfolioService, and sends the rendered page or status back.
No business logic lives here.
"""
