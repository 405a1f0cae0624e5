"""Connectors — adapters de borda para HTTP de entrada e saída.

Estrutura:
- auth_form/: parse do request do formulário e contexto do request
- n8n/: cliente HTTP do webhook n8n
"""

__all__: list[str] = []
