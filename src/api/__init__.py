"""API: camada de borda com a plataforma Twitch.

Subpastas:
- connectors/: cliente Helix, validação, envelope de resposta e assinatura
- routes/: endpoint HTTP para entregas EventSub

NÃO PODE conter: configuração global mutável nem estado de sessão.
"""
