"""App: contratos e infraestrutura compartilhada do cliente.

Subpastas:
- protocols/: contratos/interfaces (executor HTTP)
- observability/: correlation_id para logs estruturados
- bootstrap/: logging, validação de settings e app ASGI com o webhook

Padrão: app define contratos; api adapta para a plataforma externa.
"""
