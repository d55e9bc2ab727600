"""Sample OpenAPI documents shared by the tests."""

import textwrap


ORDERS_API = textwrap.dedent(
    """\
    openapi: 3.0.3
    info:
      title: Orders
      version: "1.0"
    paths:
      /orders/{orderKey}:
        parameters:
          - name: orderKey
            in: path
            required: true
            schema:
              type: string
        get:
          parameters:
            - name: tenantKey
              in: path
              required: true
              schema:
                $ref: '#/components/schemas/TenantKey'
          responses:
            '200':
              description: ok
              content:
                application/json:
                  schema:
                    $ref: '#/components/schemas/Order'
      /orders:
        post:
          requestBody:
            content:
              application/json:
                schema:
                  $ref: '#/components/schemas/OrderRequest'
          responses:
            '201':
              description: created
    components:
      schemas:
        TenantKey:
          type: string
          x-semantic-type: TenantKey
        AccountKey:
          type: string
        Order:
          type: object
          properties:
            orderKey:
              type: string
            tenantKey:
              $ref: '#/components/schemas/TenantKey'
        OrderRequest:
          type: object
          properties:
            note:
              type: string
    """
)

CLEAN_API = textwrap.dedent(
    """\
    openapi: 3.0.3
    info:
      title: Clean
      version: "1.0"
    paths:
      /tenants/{tenantKey}:
        put:
          parameters:
            - name: tenantKey
              in: path
              required: true
              schema:
                $ref: '#/components/schemas/TenantKey'
          requestBody:
            content:
              application/json:
                schema:
                  $ref: '#/components/schemas/TenantUpdate'
          responses:
            '204':
              description: updated
    components:
      schemas:
        TenantKey:
          type: string
          x-semantic-type: TenantKey
        TenantUpdate:
          type: object
          additionalProperties: false
          properties:
            tenantKey:
              $ref: '#/components/schemas/TenantKey'
    """
)
