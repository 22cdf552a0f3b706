"""
Lambda Function Handler - Clean Architecture
Ponto de entrada configurado na AWS Lambda (GET /api/weather?city=...)
"""
from infrastructure.adapters.input.lambda_handler import lambda_handler

__all__ = ['lambda_handler']
