from .ctrl_sum_check import CTRL_SUM_CHECK
from .alpha_ctrl_sum_check import ALPHA_CTRL_SUM_CHECK
from .alpha_fixed_value_check import ALPHA_FIXED_VALUE_CHECK
from .alpha_end_to_end_id_check import ALPHA_END_TO_END_ID_CHECK
from .alpha_paymentinf_id_check import ALPHA_PAYMENTINF_ID_CHECK
from .alpha_filename_check import ALPHA_FILENAME_CHECK
from .alpha_creation_vs_execution_check import ALPHA_CREATION_VS_EXECUTION_CHECK
from .eurobank_no_org_id_check import EUROBANK_NO_ORG_ID_CHECK
from .eurobank_end_to_end_id_check import EUROBANK_END_TO_END_ID_CHECK

__all__ = [
    "CTRL_SUM_CHECK",
    "ALPHA_CTRL_SUM_CHECK",
    "ALPHA_FIXED_VALUE_CHECK",
    "ALPHA_END_TO_END_ID_CHECK",
    "ALPHA_PAYMENTINF_ID_CHECK",
    "ALPHA_FILENAME_CHECK",
    "ALPHA_CREATION_VS_EXECUTION_CHECK",
    "EUROBANK_NO_ORG_ID_CHECK",
    "EUROBANK_END_TO_END_ID_CHECK",
]
