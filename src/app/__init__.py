"""App — orquestração, casos de uso e infraestrutura.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- use_cases/: casos de uso (relay da submissão)
- domain/: tipos de domínio (contexto do request, resultado de entrega)
- infra/: implementações concretas de IO (selfies, log de debug)
- protocols/: contratos/interfaces
- observability/: correlation_id para logs estruturados

Padrão: app executa; api adapta; config configura; utils apoia.
"""
