"""FastAPI application entry point."""

import logging

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from mortgage_calculator.config import settings
from mortgage_calculator.api.routes import market, mortgage

logging.basicConfig(level=settings.log_level)

app = FastAPI(
    title="Mortgage Calculator",
    description="Repayment mortgage calculator with Bank of England base rate lookup",
    version="0.1.0",
    debug=settings.debug,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(mortgage.router)
app.include_router(market.router)


@app.get("/health")
async def health():
    return {"status": "ok"}


def serve(host: str = "127.0.0.1", port: int = 8000) -> None:
    uvicorn.run("mortgage_calculator.api.app:app", host=host, port=port)
