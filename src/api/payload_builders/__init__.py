"""Payload builders — construção de payloads para destinos externos.

Estrutura:
- n8n/: eventos do formulário de autenticação para webhooks n8n
"""

__all__: list[str] = []
