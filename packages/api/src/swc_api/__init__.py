"""
swc_api — REST API for the SWC platform.

Endpoints:
    GET  /health, /ready
    /v1/{techniques, design-templates, maintenance-templates, materials,
         sites, site-techniques, metrics, designs, design-layers,
         boqs, boq-items, cost-records}
        GET (list), POST, GET /{id}, PATCH /{id}, DELETE /{id}
"""
