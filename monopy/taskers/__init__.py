"""
Taskers each build one task of a python sub-project into its graph
"""
