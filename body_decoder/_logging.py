# =============================================================================
# Body Decoder -- Package Logger
# =============================================================================

import logging

logger = logging.getLogger("body_decoder")
