from fastapi import APIRouter, Depends

from pagewise.core.config import get_settings
from pagewise.core.pagination import PaginationOptions
from pagewise.core.paginator import Paginator
from pagewise.core.response import page_response
from pagewise.deps import PageParams, get_page_params, get_paginator, get_registry, get_source
from pagewise.sources.base import DataSource, SourceRegistry

router = APIRouter()


@router.get("")
def collections_index(registry: SourceRegistry = Depends(get_registry)):
    """List registered collection names."""
    return {"collections": registry.names()}


@router.get("/{name}")
def collection_page(
    source: DataSource = Depends(get_source),
    params: PageParams = Depends(get_page_params),
    paginator: Paginator = Depends(get_paginator),
):
    """One page of a collection, with pagination metadata."""
    options = PaginationOptions(debug=get_settings().debug or None)
    result = paginator.paginate(source, raw_page=params.page, raw_size=params.size, options=options)
    return page_response(result)
