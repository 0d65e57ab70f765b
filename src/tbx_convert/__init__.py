"""
tbx_convert - Convert TBX-Basic termbases into TBX-Min.
"""
