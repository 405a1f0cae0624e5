"""API — camada de borda.

Responsabilidades:
- Receber o request do formulário e parsear o JSON
- Construir o evento para o n8n
- Entregar o evento via HTTP

Subpastas:
- connectors/: adapters HTTP (formulário de entrada, webhook n8n)
- payload_builders/: construção do evento enviado ao n8n
- routes/: endpoints HTTP (relay, página de teste, health)

NÃO PODE conter: orquestração de use cases.
"""
