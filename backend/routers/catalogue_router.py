# backend/routers/catalogue_router.py
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response
from sqlalchemy import or_
from sqlalchemy.orm import Session

from backend.core.crud import apply_patch, delete_or_404, get_or_404, patch_values
from backend.core.errors import commit_or_500
from backend.core.responses import ok
from backend.database.session import get_db
from backend.models.product_model import Category, PriceOption, Product
from backend.schemas.catalogue import (
    CategoryCreate, CategoryOut, CategoryUpdate, PriceOptionCreate, PriceOptionOut,
    PriceOptionUpdate, ProductCreate, ProductOut, ProductUpdate,
)

router = APIRouter(tags=["catalogue"])

CATEGORY_NOT_FOUND = "Category not found"
OPTION_NOT_FOUND = "Price option not found"
PRODUCT_NOT_FOUND = "Product not found"


def _product_out(p: Product) -> ProductOut:
    out = ProductOut.model_validate(p)
    out.category_name = p.category.name if p.category else None
    return out


def _category_name_taken(db: Session, name: str, exclude_id: Optional[int] = None) -> bool:
    q = db.query(Category.id).filter(Category.name == name)
    if exclude_id is not None:
        q = q.filter(Category.id != exclude_id)
    return q.first() is not None


def _check_category(db: Session, category_id: Optional[int]) -> None:
    if category_id is not None and db.get(Category, category_id) is None:
        raise HTTPException(status_code=400, detail="Invalid category")


# ---------- categories ----------

@router.get("/categories")
def list_categories(db: Session = Depends(get_db)):
    return ok([CategoryOut.model_validate(c) for c in db.query(Category).order_by(Category.name).all()])


@router.get("/categories/{category_id}")
def get_category(category_id: int, db: Session = Depends(get_db)):
    return ok(CategoryOut.model_validate(get_or_404(db, Category, category_id, CATEGORY_NOT_FOUND)))


@router.post("/categories", status_code=201)
def create_category(body: CategoryCreate, db: Session = Depends(get_db)):
    if _category_name_taken(db, body.name):
        raise HTTPException(status_code=400, detail="Category already exists")
    category = Category(name=body.name)
    db.add(category)
    commit_or_500(db, "Error creating category")
    db.refresh(category)
    return ok(CategoryOut.model_validate(category))


@router.put("/categories/{category_id}")
def update_category(category_id: int, body: CategoryUpdate, db: Session = Depends(get_db)):
    category = get_or_404(db, Category, category_id, CATEGORY_NOT_FOUND)
    values = patch_values(body)
    if values.get("name") and _category_name_taken(db, values["name"], exclude_id=category_id):
        raise HTTPException(status_code=400, detail="Category already exists")
    apply_patch(category, body, values)
    commit_or_500(db, "Error updating category")
    db.refresh(category)
    return ok(CategoryOut.model_validate(category))


@router.delete("/categories/{category_id}", status_code=204)
def delete_category(category_id: int, db: Session = Depends(get_db)):
    category = get_or_404(db, Category, category_id, CATEGORY_NOT_FOUND)
    if db.query(Product.id).filter(Product.category_id == category_id).first():
        raise HTTPException(status_code=409, detail="Category has products")
    db.delete(category)
    commit_or_500(db, "Error deleting category")
    return Response(status_code=204)


# ---------- price options ----------

@router.get("/categories/{category_id}/price-options")
def list_price_options(category_id: int, db: Session = Depends(get_db)):
    category = get_or_404(db, Category, category_id, CATEGORY_NOT_FOUND)
    return ok([PriceOptionOut.model_validate(o) for o in category.price_options])


@router.post("/categories/{category_id}/price-options", status_code=201)
def create_price_option(category_id: int, body: PriceOptionCreate, db: Session = Depends(get_db)):
    get_or_404(db, Category, category_id, CATEGORY_NOT_FOUND)
    option = PriceOption(category_id=category_id, label=body.label, value=body.value)
    db.add(option)
    commit_or_500(db, "Error creating price option")
    db.refresh(option)
    return ok(PriceOptionOut.model_validate(option))


@router.put("/price-options/{option_id}")
def update_price_option(option_id: int, body: PriceOptionUpdate, db: Session = Depends(get_db)):
    option = get_or_404(db, PriceOption, option_id, OPTION_NOT_FOUND)
    apply_patch(option, body)
    commit_or_500(db, "Error updating price option")
    db.refresh(option)
    return ok(PriceOptionOut.model_validate(option))


@router.delete("/price-options/{option_id}", status_code=204)
def delete_price_option(option_id: int, db: Session = Depends(get_db)):
    delete_or_404(db, PriceOption, option_id, OPTION_NOT_FOUND, "Error deleting price option")
    return Response(status_code=204)


# ---------- products ----------

@router.get("/products")
def list_products(
    category_id: Optional[int] = Query(default=None, alias="categoryId"),
    search: Optional[str] = Query(default=None),
    db: Session = Depends(get_db),
):
    q = db.query(Product)
    if category_id is not None:
        q = q.filter(Product.category_id == category_id)
    if search:
        like = f"%{search.strip()}%"
        q = q.filter(or_(Product.product_name.ilike(like), Product.product_code.ilike(like)))
    return ok([_product_out(p) for p in q.order_by(Product.product_name).all()])


@router.get("/products/low-stock")
def list_low_stock(db: Session = Depends(get_db)):
    rows = (
        db.query(Product)
        .filter(Product.is_active.is_(True), Product.current_stock <= Product.reorder_level)
        .order_by(Product.current_stock)
        .all()
    )
    return ok([_product_out(p) for p in rows])


@router.get("/products/{product_id}")
def get_product(product_id: int, db: Session = Depends(get_db)):
    return ok(_product_out(get_or_404(db, Product, product_id, PRODUCT_NOT_FOUND)))


@router.post("/products", status_code=201)
def create_product(body: ProductCreate, db: Session = Depends(get_db)):
    if db.query(Product.id).filter(Product.product_code == body.product_code).first():
        raise HTTPException(status_code=400, detail="Product code already exists")
    _check_category(db, body.category_id)
    product = Product(**body.model_dump())
    db.add(product)
    commit_or_500(db, "Error creating product")
    db.refresh(product)
    return ok(_product_out(product))


@router.put("/products/{product_id}")
def update_product(product_id: int, body: ProductUpdate, db: Session = Depends(get_db)):
    product = get_or_404(db, Product, product_id, PRODUCT_NOT_FOUND)
    values = patch_values(body)
    if "product_code" in values:
        clash = (
            db.query(Product.id)
            .filter(Product.product_code == values["product_code"], Product.id != product_id)
            .first()
        )
        if clash:
            raise HTTPException(status_code=400, detail="Product code already exists")
    _check_category(db, values.get("category_id"))
    apply_patch(product, body, values)
    commit_or_500(db, "Error updating product")
    db.refresh(product)
    return ok(_product_out(product))


@router.delete("/products/{product_id}", status_code=204)
def delete_product(product_id: int, db: Session = Depends(get_db)):
    delete_or_404(db, Product, product_id, PRODUCT_NOT_FOUND, "Error deleting product")
    return Response(status_code=204)
