# product_service/main.py
from uuid import UUID

from fastapi import FastAPI, HTTPException

from app.data.seed import DEMO_PRODUCTS

app = FastAPI(title="Product Service (dev mock)")


PRODUCTS = {p["id"]: p for p in DEMO_PRODUCTS}


@app.get("/products/{product_id}")
def get_product(product_id: UUID):
    product = PRODUCTS.get(product_id)
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")
    return product
