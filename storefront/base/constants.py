""" All Application Constants declare here... """

# Python Packages
from decouple import config


# App Constants
APP_ENV                         =   config('APP_ENV', default = 'development')
APP_SECRET_KEY                  =   config('APP_SECRET_KEY', default = 'change-me')


# Swagger Constants
SWAGGER_APP_PROPS       =   {
                                "name": "Storefront Deals",
                                "version": "1.0",
                                "description": "Admin and storefront APIs for promotional deals: \
                                catalog bundles, image galleries and publication status."
                            }


# Logging Constants
LOG_LEVEL                       =   config('LOG_LEVEL', default = 'INFO')
LOG_DIR                         =   config('LOG_DIR', default = '')


# Database Constants
DATABASE_URL                    =   config('DATABASE_URL', default = '')
DB_HOST                         =   config('DB_HOST', default = 'localhost')
DB_PORT                         =   config('DB_PORT', default = '5432')
DB_NAME                         =   config('DB_NAME', default = 'storefront')
DB_USER                         =   config('DB_USER', default = 'postgres')
DB_PASSWORD                     =   config('DB_PASSWORD', default = '')


# AWS Constants
AWS_ACCESS_KEY_ID		        =	config('AWS_ACCESS_KEY_ID', default = '')
AWS_SECRET_ACCESS_KEY	        =	config('AWS_SECRET_ACCESS_KEY', default = '')
AWS_REGION				        =	config('AWS_REGION', default = 'us-east-1')
AWS_S3_BUCKET_NAME	            =	config('AWS_S3_BUCKET_NAME', default = '')
AWS_S3_PUBLIC_URL               =   config('AWS_S3_PUBLIC_URL', default = '')


# Media Constants
MEDIA_FOLDER                    =   config('MEDIA_FOLDER', default = 'deals')
MEDIA_MAX_WORKERS               =   config('MEDIA_MAX_WORKERS', default = 4, cast = int)


# Deal Constants
DEAL_IMAGE_FIELD_PREFIX         =   "dealImage"
DEAL_CREATE_IMAGE_SLOTS         =   4
DEAL_DEFAULT_TYPE               =   "flash_sale"

DEAL_STATUSES                   =   ("draft", "published", "archived", "scheduled")
DEAL_DEFAULT_STATUS             =   "draft"

DEAL_DISCOUNT_TYPES             =   ("percentage", "fixed")
DEAL_DEFAULT_DISCOUNT_TYPE      =   "percentage"
