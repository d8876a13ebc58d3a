"""Interfaces (application boundary) for THAIBILL.

Defines framework-free application contracts shared by the service layer and
adapters, currently the file access port used to read invoice input files.

Dependency rule: this package is independent; do not import from any other
`thaibill.*` modules. It may be imported by `thaibill.service_layer`,
`thaibill.adapters`, and `thaibill.bootstrap`.
"""
