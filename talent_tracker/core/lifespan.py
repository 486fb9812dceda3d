from contextlib import asynccontextmanager
import logging

from talent_tracker.core.config.extraction import get_extraction_config
from talent_tracker.taxonomy import get_default_taxonomy_provider

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app):
    taxonomy = get_default_taxonomy_provider()
    config = get_extraction_config()
    logger.info(
        "knowledge_base_loaded skills=%d normalizations=%d config_sections=%d",
        len(taxonomy.vocabulary),
        len(taxonomy.normalizations),
        len(config),
    )
    yield
